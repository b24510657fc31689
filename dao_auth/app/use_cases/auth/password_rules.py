from dao_auth.libs.result import Error, Result, Return


def validate_new_password(password: str, min_length: int) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate
        min_length: Minimum number of characters

    Returns:
        Result with None if valid, or Error if invalid
    """
    if len(password) < min_length:
        return Return.err(
            Error(
                "VALIDATION_ERROR",
                f"Password must be at least {min_length} characters long",
            )
        )
    return Return.ok(None)
