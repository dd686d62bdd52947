"""
Authentication endpoints: register and login.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.security import (
    authenticate_user,
    create_access_token,
    get_password_hash,
)
from app.models.user import User
from app.schemas.auth import UserCredentials, TokenResponse, MessageResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)
router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post("/register", response_model=MessageResponse)
async def register(credentials: UserCredentials, db: Session = Depends(get_db)):
    """
    Create a new API user.
    
    Raises:
        HTTPException: 400 if the username already exists
    """
    if db.query(User).filter(User.username == credentials.username).first():
        raise HTTPException(status_code=400, detail="Username already exists")
    
    user = User(
        username=credentials.username,
        password_hash=get_password_hash(credentials.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Username already exists")
    
    logger.info(f"Registered user '{credentials.username}'")
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)  # Prevent brute force attacks
async def login(request: Request, credentials: UserCredentials, db: Session = Depends(get_db)):
    """
    Exchange username/password for a JWT bearer token.
    
    Raises:
        HTTPException: 401 if credentials are invalid
    """
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        logger.warning(f"Failed login attempt for username: {credentials.username}")
        raise HTTPException(
            status_code=401,
            detail="Invalid username or password",
        )
    
    access_token = create_access_token(data={"sub": user.username})
    logger.info(f"User '{user.username}' logged in")
    
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )
