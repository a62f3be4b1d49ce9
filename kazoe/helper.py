from kazoe.errors import KazoeError


def error_message(line: str, location: int, message: str) -> str:
    # the caret may sit one past the last character for end-of-input errors
    return f"{line}\n{' ' * location}^ {message}\n"


def describe_error(line: str, err: KazoeError) -> str:
    if err.location is None:
        return f"{err.message}\n"
    return error_message(line, err.location, err.message)
