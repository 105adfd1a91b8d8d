# storage.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from schemas import ConfigurationRecord, CubeConfiguration, SolutionData, SolutionRecord

logger = logging.getLogger(__name__)


class MemStorage:
    """
    Process-lifetime store of configurations and solutions keyed by generated ids.
    Nothing is ever evicted.
    """

    def __init__(self):
        self.configurations: Dict[str, ConfigurationRecord] = {}
        self.solutions: Dict[str, SolutionRecord] = {}

    def get_configuration(self, config_id: str) -> Optional[ConfigurationRecord]:
        return self.configurations.get(config_id)

    def create_configuration(self, configuration: CubeConfiguration, name: Optional[str] = None) -> ConfigurationRecord:
        record = ConfigurationRecord(
            id=str(uuid.uuid4()),
            name=name or None,
            configuration=configuration,
            created_at=datetime.now(timezone.utc),
        )
        self.configurations[record.id] = record
        logger.debug("Stored configuration %s", record.id)
        return record

    def get_solution(self, solution_id: str) -> Optional[SolutionRecord]:
        return self.solutions.get(solution_id)

    def create_solution(self, solution: SolutionData, configuration_id: Optional[str] = None) -> SolutionRecord:
        record = SolutionRecord(
            id=str(uuid.uuid4()),
            configuration_id=configuration_id or None,
            solution=solution,
            created_at=datetime.now(timezone.utc),
        )
        self.solutions[record.id] = record
        logger.debug("Stored solution %s for configuration %s", record.id, record.configuration_id)
        return record
