"""CPF checksum validator."""

import pytest

from application.utils import cpf as CPF


@pytest.mark.parametrize("value", ["529.982.247-25", "52998224725", "111.444.777-35", " 111.444.777-35 "])
def test_accepts_valid_cpf(value):
    assert CPF.is_valid(value)


@pytest.mark.parametrize(
    "value",
    [
        "529.982.247-26",  # segundo dígito errado
        "529.982.247-15",  # primeiro dígito errado
        "111.111.111-11",
        "000.000.000-00",
        "5299822472",
        "529982247251",
        "abc.def.ghi-jk",
        "",
        None,
    ],
)
def test_rejects_invalid_cpf(value):
    assert not CPF.is_valid(value)


def test_strip_removes_mask():
    assert CPF.strip("529.982.247-25") == "52998224725"
    assert CPF.strip(None) == ""
