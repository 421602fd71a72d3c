# cpf.py
import re

CPF_RE = re.compile(r"[.\-\s]")
CPF_LENGTH = 11


def strip(cpf: str | None) -> str:
    """Remove a máscara (pontos, hífen e espaços)."""
    return CPF_RE.sub("", cpf or "")


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def is_valid(cpf: str | None) -> bool:
    """Valida os dois dígitos verificadores (módulo 11) de um CPF com ou sem máscara."""
    digits = strip(cpf)
    if len(digits) != CPF_LENGTH or not digits.isdigit():
        return False
    # 000.000.000-00, 111.111.111-11... passam no cálculo mas não são CPFs válidos
    if digits == digits[0] * CPF_LENGTH:
        return False

    first = _check_digit(digits[:9])
    second = _check_digit(digits[:9] + str(first))
    return digits[-2:] == f"{first}{second}"
