"""Очистка пользовательского текста перед сохранением."""

import re

_SPECIAL_CHARACTERS = re.compile(r"[^\w\s]")


def strip_special_characters(value) -> str:
    """
    Удаляет все символы, кроме буквенно-цифровых, подчеркивания и пробельных.
    Значение предварительно приводится к строке.
    """
    return _SPECIAL_CHARACTERS.sub("", str(value))
