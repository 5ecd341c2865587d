"""
Base class for the database seeders.
"""

import random
from typing import Any, List, Optional

from faker import Faker


class BaseSeeder:
    """Shared Faker instance and random source for seeders."""

    def __init__(self, fake: Optional[Faker] = None, seed: Optional[int] = None):
        self.fake = fake or Faker()
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
        self.created_objects: List[Any] = []

    def seed(self, count: int = 1, **kwargs) -> List[Any]:
        raise NotImplementedError

    def _track(self, obj):
        self.created_objects.append(obj)
        return obj
