from abc import ABC, abstractmethod
from typing import Any, Dict


class Workflow(ABC):
    @abstractmethod
    def run(self, input: Dict) -> Any:
        pass
