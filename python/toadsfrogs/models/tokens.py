"""Token values stored in a board's cells."""

TOKEN_A = False  # starts on the left
TOKEN_B = True  # starts on the right


def symbol(token: bool) -> str:
    return "1" if token else "0"
