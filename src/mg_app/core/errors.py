from __future__ import annotations

from fastapi import HTTPException, status


class MgAppError(Exception):
    """Base application exception."""

    pass


class BadRequest(MgAppError):
    pass


class NotFound(MgAppError):
    pass


class UnsupportedMedia(MgAppError):
    """The media kind is unrecognized or lacks the capability an operation needs."""

    pass


def to_http(exc: Exception) -> HTTPException:
    """
    Convert our exceptions to HTTPException with sensible defaults.
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, BadRequest):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, UnsupportedMedia):
        return HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(exc)
        )
    if isinstance(exc, MgAppError):
        return HTTPException(status_code=422, detail=str(exc))
    # Fallback
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
