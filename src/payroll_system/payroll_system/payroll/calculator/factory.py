from __future__ import annotations

from typing import Optional

from ...core.enums import Gender
from ...core.exceptions import ConfigurationError
from ...workers.model import Worker
from .base import PayPolicy
from .policies.daily_wage_policy import DailyWageNoPaidOffPolicy
from .policies.salaried_policy import SalariedWithPaidOffPolicy


class PayPolicyFactory:
    """Factory Pattern: pick the pay policy that applies to a worker."""

    def __init__(self, policies: Optional[dict[Gender, PayPolicy]] = None):
        self._policies: dict[Gender, PayPolicy] = dict(
            policies
            or {
                Gender.MALE: SalariedWithPaidOffPolicy(),
                Gender.FEMALE: DailyWageNoPaidOffPolicy(),
            }
        )

    def register(self, gender: Gender, policy: PayPolicy) -> None:
        self._policies[gender] = policy

    def for_worker(self, worker: Worker) -> PayPolicy:
        policy = self._policies.get(worker.gender)
        if policy is None:
            raise ConfigurationError(
                f"No pay policy configured for gender {worker.gender!r} (worker {worker.worker_id})"
            )
        return policy
