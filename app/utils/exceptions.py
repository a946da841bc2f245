from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES: the `error.code` string clients branch on
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR        = "VALIDATION_ERROR"
    UNAUTHORIZED            = "UNAUTHORIZED"
    TOKEN_EXPIRED           = "TOKEN_EXPIRED"
    FORBIDDEN               = "FORBIDDEN"
    ACCOUNT_INACTIVE        = "ACCOUNT_INACTIVE"
    NOT_FOUND               = "NOT_FOUND"
    DUPLICATE_ENTRY         = "DUPLICATE_ENTRY"
    # Booking admission / lifecycle
    BOOKING_CONFLICT        = "BOOKING_CONFLICT"
    VEHICLE_UNAVAILABLE     = "VEHICLE_UNAVAILABLE"
    INVALID_STATUS          = "INVALID_STATUS"
    INVALID_TRANSITION      = "INVALID_TRANSITION"
    INVALID_DATE_RANGE      = "INVALID_DATE_RANGE"
    INTERNAL_SERVER_ERROR   = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base for every error the API reports on purpose.

    Subclasses pin `http_status`, `code` and `default_message`; the
    middleware turns `detail` into the JSON error envelope.
    """
    http_status:     int = status.HTTP_400_BAD_REQUEST
    code:            str = ErrorCode.INTERNAL_SERVER_ERROR
    default_message: str = "Request could not be processed"

    def __init__(self, message: str | None = None, details: list | None = None, field: str | None = None):
        self.message    = message or self.default_message
        self.error_code = self.code
        super().__init__(status_code=self.http_status, detail={
            "message": self.message,
            "error":   {"code": self.code, "details": details, "field": field},
        })


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════
class UnauthorizedException(AppException):
    http_status     = status.HTTP_401_UNAUTHORIZED
    code            = ErrorCode.UNAUTHORIZED
    default_message = "Authentication required"


class TokenExpiredException(UnauthorizedException):
    code            = ErrorCode.TOKEN_EXPIRED
    default_message = "Access token has expired"


class ForbiddenException(AppException):
    http_status     = status.HTTP_403_FORBIDDEN
    code            = ErrorCode.FORBIDDEN
    default_message = "You do not have permission to perform this action"


class AccountInactiveException(ForbiddenException):
    code            = ErrorCode.ACCOUNT_INACTIVE
    default_message = "Your account has been deactivated. Contact admin."


# ═══════════════════════════════════════════════════════════════════════════════
# RECORDS
# ═══════════════════════════════════════════════════════════════════════════════
class NotFoundException(AppException):
    http_status = status.HTTP_404_NOT_FOUND
    code        = ErrorCode.NOT_FOUND

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")


class DuplicateEntryException(AppException):
    http_status     = status.HTTP_409_CONFLICT
    code            = ErrorCode.DUPLICATE_ENTRY
    default_message = "The request conflicts with existing data."


# ═══════════════════════════════════════════════════════════════════════════════
# BOOKINGS
# ═══════════════════════════════════════════════════════════════════════════════
class BookingConflictException(AppException):
    http_status     = status.HTTP_409_CONFLICT
    code            = ErrorCode.BOOKING_CONFLICT
    default_message = "The motorcycle is already booked for the selected dates"


class VehicleUnavailableException(AppException):
    code            = ErrorCode.VEHICLE_UNAVAILABLE
    default_message = "Motorcycle is currently not available for rent"


class InvalidDateRangeException(AppException):
    code            = ErrorCode.INVALID_DATE_RANGE
    default_message = "End date must be on or after start date"


class InvalidStatusException(AppException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code        = ErrorCode.INVALID_STATUS

    def __init__(self, value: str, allowed: list[str]):
        super().__init__(f"Invalid status '{value}'. Allowed: {', '.join(allowed)}", field="status")


class InvalidTransitionException(AppException):
    code = ErrorCode.INVALID_TRANSITION

    def __init__(self, current: str, target: str, allowed: list[str]):
        self.current = current
        self.target  = target
        super().__init__(
            f"Cannot change status from '{current}' to '{target}'. "
            f"Allowed: {', '.join(allowed) if allowed else 'none'}",
            field="status",
        )
