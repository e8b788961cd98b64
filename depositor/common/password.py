import secrets
import string
from pathlib import Path

SPECIAL_CHARS = '!@#$%^&*()_'
PASSWORD_LENGTH = 20
# deposit-cli rejects shorter keystore passwords
MIN_PASSWORD_LENGTH = 8

PASSWORD_ALPHABETS = [
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    SPECIAL_CHARS,
]


class PasswordError(ValueError):
    pass


def generate_password(length: int = PASSWORD_LENGTH) -> str:
    """Random password with at least one char from each alphabet."""
    rng = secrets.SystemRandom()
    chars = [secrets.choice(alphabet) for alphabet in PASSWORD_ALPHABETS]
    full_alphabet = ''.join(PASSWORD_ALPHABETS)
    chars.extend(secrets.choice(full_alphabet) for _ in range(length - len(chars)))
    rng.shuffle(chars)
    return ''.join(chars)


def read_password_file(password_file: Path) -> str:
    with open(password_file, 'r', encoding='utf-8') as file:
        password = file.readline().rstrip('\r\n')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordError(
            f'Keystore password in {password_file} must be at least '
            f'{MIN_PASSWORD_LENGTH} characters long'
        )
    return password


def create_password_file(password_file: Path) -> str:
    password = generate_password()
    password_file.parent.mkdir(parents=True, exist_ok=True)
    with open(password_file, 'w', encoding='utf-8') as file:
        file.write(password)
    return password
