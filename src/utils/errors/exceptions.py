"""Exceções compartilhadas: falhas de infraestrutura e validação de entrada."""

from __future__ import annotations

from collections.abc import Iterable


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""


class MissingRequiredListsError(ValueError):
    """Listas obrigatórias (followers/following) ausentes ou vazias.

    Validação do chamador: a derivação em si nunca levanta exceção.
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"Listas obrigatórias ausentes ou vazias: {', '.join(self.missing)}"
        )
