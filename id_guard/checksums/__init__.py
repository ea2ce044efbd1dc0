"""Checksum families, one module per algorithm shape.

Every family is a pair of pure functions over a shape-matched candidate:
``validate`` returns the failure reason (None when the candidate is
consistent) and ``check_character`` derives the check char(s) for a body.
The families are selected through :func:`evaluate` by :class:`Algorithm`.
"""

from __future__ import annotations
from collections.abc import Callable
from typing import NamedTuple

from . import (
    bsn,
    cedula,
    codice_fiscale,
    cpf,
    curp,
    dni,
    my_number,
    nric,
    ric,
    rrn,
    rut,
    taiwan,
)
from ..exceptions import RegistryError
from ..models import Algorithm, FailureReason


class _Family(NamedTuple):
    validate: Callable[[str], FailureReason | None]
    check_character: Callable[[str], str]
    tables: tuple[str, ...]  # lookup tables indexed by sum mod modulus
    modulus: int


_FAMILIES: dict[Algorithm, _Family] = {
    Algorithm.MOD11_CYCLIC: _Family(
        rut.validate, rut.check_character, (rut.CHECK_CHARS,), rut.MODULUS
    ),
    Algorithm.MOD10_POSITIONAL: _Family(
        curp.validate, curp.check_character, (curp.CHECK_DIGITS,), curp.MODULUS
    ),
    Algorithm.MOD11_WEIGHTED_CHAR: _Family(
        ric.validate, ric.check_character, (ric.CHECK_CHARS,), ric.MODULUS
    ),
    Algorithm.MOD23_LETTER: _Family(
        dni.validate_dni, dni.dni_check_character, (dni.LETTERS,), dni.MODULUS
    ),
    Algorithm.MOD23_LETTER_PREFIXED: _Family(
        dni.validate_nie, dni.nie_check_character, (dni.LETTERS,), dni.MODULUS
    ),
    Algorithm.MOD11_PROOF: _Family(bsn.validate, bsn.check_character, (), bsn.MODULUS),
    Algorithm.MOD10_FOLDED: _Family(
        my_number.validate,
        my_number.check_character,
        (my_number.CHECK_DIGITS,),
        my_number.MODULUS,
    ),
    Algorithm.MOD11_DUAL: _Family(
        cpf.validate, cpf.check_character, (cpf.CHECK_DIGITS,), cpf.MODULUS
    ),
    Algorithm.MOD26_ODD_EVEN: _Family(
        codice_fiscale.validate,
        codice_fiscale.check_character,
        (codice_fiscale.CHECK_LETTERS,),
        codice_fiscale.MODULUS,
    ),
    Algorithm.MOD11_LETTER: _Family(
        nric.validate,
        nric.check_character,
        (nric.ST_LETTERS, nric.FG_LETTERS),
        nric.MODULUS,
    ),
    Algorithm.MOD10_LETTER_PREFIXED: _Family(
        taiwan.validate, taiwan.check_character, (taiwan.CHECK_DIGITS,), taiwan.MODULUS
    ),
    Algorithm.MOD11_MOD10: _Family(
        rrn.validate, rrn.check_character, (rrn.CHECK_DIGITS,), rrn.MODULUS
    ),
    Algorithm.MOD10_ALTERNATING: _Family(
        cedula.validate, cedula.check_character, (cedula.CHECK_DIGITS,), cedula.MODULUS
    ),
}

# (name, weight vector, expected length)
_WEIGHT_VECTORS: tuple[tuple[str, tuple[int, ...], int], ...] = (
    ("ric.WEIGHTS", ric.WEIGHTS, 17),
    ("bsn.WEIGHTS", bsn.WEIGHTS, bsn.LENGTH),
    ("nric.WEIGHTS", nric.WEIGHTS, 7),
    ("taiwan.WEIGHTS", taiwan.WEIGHTS, 10),
    ("rrn.WEIGHTS", rrn.WEIGHTS, 12),
)


def evaluate(algorithm: Algorithm, candidate: str) -> FailureReason | None:
    """Run the checksum family for ``algorithm`` on a shape-matched candidate."""
    return _FAMILIES[algorithm].validate(candidate)


def is_checksum_valid(algorithm: Algorithm, candidate: str) -> bool:
    return evaluate(algorithm, candidate) is None


def check_character(algorithm: Algorithm, body: str) -> str:
    """Derive the check char(s) that complete ``body`` under ``algorithm``."""
    return _FAMILIES[algorithm].check_character(body)


def verify_tables() -> None:
    """Raise RegistryError if any family could index outside its lookup table."""
    missing = [a.value for a in Algorithm if a not in _FAMILIES]
    if missing:
        raise RegistryError("no checksum family for algorithm(s): {}", ", ".join(missing))
    for algorithm, family in _FAMILIES.items():
        for table in family.tables:
            if len(table) != family.modulus:
                raise RegistryError(
                    "{}: table {!r} has {} entries for modulus {}",
                    algorithm.value,
                    table,
                    len(table),
                    family.modulus,
                )
    for name, weights, length in _WEIGHT_VECTORS:
        if len(weights) != length:
            raise RegistryError("{} has {} weights, expected {}", name, len(weights), length)


__all__ = [
    "evaluate",
    "is_checksum_valid",
    "check_character",
    "verify_tables",
]
