"""Codes résultat des opérations sur les pages"""

from enum import Enum


class Z(Enum):
    OK = "ok"
    DBERR = "dberr"
    URL_EXISTS = "url_exists"
    NOT_FOUND = "not_found"
    WRONG_EDITCODE = "wrong_editcode"
    EXISTS = "exists"

    @property
    def message(self) -> str:
        return Z_MESSAGES.get(self, "Unknown error")


Z_MESSAGES = {
    Z.OK: "OK",
    Z.DBERR: "Internal Database error",
    Z.URL_EXISTS: "URL exists",
    Z.NOT_FOUND: "Not found",
    Z.WRONG_EDITCODE: "Incorrect edit code",
    Z.EXISTS: "File exists",
}
