"""Account API router.

Registration, login and the signed-in user's own profile. Passwords are
hashed before storage and the hash never leaves the server; BMI is
recomputed by the model hooks whenever height or weight changes.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import get_current_user
from core.exceptions import AuthenticationError, ConflictError
from core.logger import get_logger
from core.repository import UserRepository, save
from core.security import create_access_token, hash_password, verify_password
from database import models
from database.deps import get_db_write
from schemas import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    UserRegisterRequest,
    UserResponse,
)

logger = get_logger("api.auth")
router = APIRouter(prefix="/api/auth", tags=["auth"])


def auth_response(user: models.User) -> AuthResponse:
    """Serialize a user together with a fresh access token."""
    profile = UserResponse.model_validate(user).model_dump()
    return AuthResponse(**profile, token=create_access_token(user.id))


def apply_profile_changes(repo: UserRepository, user: models.User, changes: dict) -> models.User:
    """Apply a partial profile update, hashing a new password and guarding email uniqueness.

    Raises:
        ConflictError: If the new email belongs to another account.
    """
    email = changes.get("email")
    if email and email != user.email:
        existing = repo.get_by_email(email)
        if existing is not None and existing.id != user.id:
            raise ConflictError("Email already registered", field="email")
    password = changes.pop("password", None)
    if password:
        changes["hashed_password"] = hash_password(password)
    return repo.update(user, changes)


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(payload: UserRegisterRequest, db: Session = Depends(get_db_write)):
    """Create an account and return it with an access token.

    Raises:
        ConflictError: If the email is already registered.
    """
    repo = UserRepository(db)
    if repo.get_by_email(payload.email) is not None:
        raise ConflictError("User already exists", field="email")

    data = payload.model_dump(exclude={"password"})
    user = save(db, models.User(**data, hashed_password=hash_password(payload.password)))
    logger.info("Registered user id=%s", user.id)
    return auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db_write)):
    """Exchange email and password for an access token.

    Raises:
        AuthenticationError: If the credentials do not match an account.
    """
    user = UserRepository(db).get_by_email(payload.email)
    if user is None or not verify_password(payload.password, user.hashed_password):
        logger.info("Failed login for %s", payload.email)
        raise AuthenticationError("Invalid email or password")
    return auth_response(user)


@router.get("/profile", response_model=UserResponse)
def get_profile(current_user: models.User = Depends(get_current_user)):
    return current_user


@router.put("/profile", response_model=AuthResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Update the signed-in user's profile fields and/or password."""
    user = apply_profile_changes(UserRepository(db), current_user, payload.changes())
    logger.info("Profile updated for user id=%s", user.id)
    return auth_response(user)
