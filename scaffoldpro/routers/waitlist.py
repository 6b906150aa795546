"""
Waitlist endpoints.

POST /api/waitlist — add an email (201 / 400 invalid or duplicate / 500 storage)
GET  /api/waitlist — list signups; bearer ADMIN_API_KEY required when configured
"""

import hmac
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/waitlist", tags=["waitlist"])

security = HTTPBearer(auto_error=False)


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """Open when ADMIN_API_KEY is empty, otherwise a matching bearer token is required."""
    expected = settings.ADMIN_API_KEY
    if not expected:
        return
    if not credentials or not hmac.compare_digest(credentials.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin API key required",
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post("", status_code=201, response_model=schemas.WaitlistResponse)
def join_waitlist(entry: schemas.WaitlistCreate, db: Session = Depends(get_db)):
    email = entry.email.strip().lower()

    try:
        existing = db.query(models.WaitlistEntry).filter(
            models.WaitlistEntry.email == email
        ).first()
        if existing:
            logger.info("Waitlist duplicate: %s", email)
            return _fail(400, "This email is already on the waitlist.")

        db.add(models.WaitlistEntry(email=email))
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same address
        db.rollback()
        return _fail(400, "This email is already on the waitlist.")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding to waitlist")
        return _fail(500, "Failed to add to waitlist. Please try again.")

    logger.info("Waitlist signup: %s", email)
    return {
        "success": True,
        "message": "Successfully added to waitlist",
        "data": {"email": email},
    }


@router.get("", response_model=schemas.WaitlistListResponse)
def list_waitlist(db: Session = Depends(get_db), _: None = Depends(require_admin)):
    try:
        entries = db.query(models.WaitlistEntry).order_by(models.WaitlistEntry.id).all()
    except SQLAlchemyError:
        logger.exception("Error retrieving waitlist")
        return _fail(500, "Failed to retrieve waitlist")
    return {"success": True, "data": entries}
