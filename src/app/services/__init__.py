"""Serviços de aplicação.

Unidades puras reutilizáveis (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.follower_changes import compare_follower_snapshots
from app.services.insight_sampler import sample_usernames
from app.services.relationship_deriver import derive, membership_set

__all__ = [
    "compare_follower_snapshots",
    "derive",
    "membership_set",
    "sample_usernames",
]
