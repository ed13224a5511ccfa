"""
Auth message catalogue and error helpers.
"""

from src.libs.result import Error
from src.domain.entities import ERROR_CODE_MESSAGES, ErrorCode

LOGIN_SUCCESSFUL = "Login successful"
SIGNUP_SUCCESSFUL = "Signup successful"
LOGOUT_SUCCESSFUL = "Logged out successfully"
SESSION_VALID = "Session is valid"
SESSION_EXPIRED = ERROR_CODE_MESSAGES[ErrorCode.SESSION_EXPIRED]
SESSION_INVALID = ERROR_CODE_MESSAGES[ErrorCode.SESSION_INVALID]


def auth_error(code: ErrorCode) -> Error:
    """Build the Error for a business error code with its fixed message"""
    return Error(code.value, ERROR_CODE_MESSAGES[code])
