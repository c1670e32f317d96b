import bcrypt
from joti.core.config import settings


def hash_editcode(editcode: str) -> str:
    # même principe que les mots de passe: on ne garde que le hash
    return bcrypt.hashpw(editcode.encode(), bcrypt.gensalt(rounds=settings.EDITCODE_ROUNDS)).decode()


def verify_editcode(editcode: str, editcode_hash: str) -> bool:
    if not editcode_hash:
        return False
    try:
        return bcrypt.checkpw(editcode.encode(), editcode_hash.encode())
    except ValueError:
        # hash corrompu ou code > 72 octets
        return False
