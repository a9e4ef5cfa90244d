"""Use cases around the session's material selection and notifications."""

from typing import List, Mapping, Optional

from cvd_platform.application.dtos.notification_dto import NotificationDTO
from cvd_platform.application.dtos.prediction_dto import (
    CurrentPredictionDTO,
    MaterialDTO,
    OutcomeDTO,
)
from cvd_platform.application.session import PredictionSession
from cvd_platform.domain.entities.material import (
    DEFAULT_MATERIAL_CODES,
    MATERIAL_CATALOGUE,
    Material,
)
from cvd_platform.domain.ports.notifier import INotificationFeed


class ListMaterialsUseCase:
    """Material catalogue with the remote code each material resolves to."""

    def __init__(
        self,
        session: PredictionSession,
        material_codes: Optional[Mapping[str, str]] = None,
    ):
        self.session = session
        self.material_codes = dict(material_codes or DEFAULT_MATERIAL_CODES)

    async def execute(self) -> List[MaterialDTO]:
        return [
            MaterialDTO.from_domain(
                material,
                info,
                self.material_codes.get(
                    material.value, DEFAULT_MATERIAL_CODES[material.value]
                ),
                selected=material == self.session.selected_material,
            )
            for material, info in MATERIAL_CATALOGUE.items()
        ]


class SelectMaterialUseCase:
    def __init__(self, session: PredictionSession):
        self.session = session

    async def execute(self, material: Material) -> Material:
        self.session.select_material(material)
        return self.session.selected_material


class GetCurrentPredictionUseCase:
    """Latest outcome of the session for the selected material, if any."""

    def __init__(self, session: PredictionSession):
        self.session = session

    async def execute(self) -> Optional[CurrentPredictionDTO]:
        if self.session.current_outcome is None:
            return None
        return CurrentPredictionDTO(
            material=self.session.selected_material,
            prediction=OutcomeDTO.from_domain(self.session.current_outcome),
        )


class DrainNotificationsUseCase:
    def __init__(self, notification_feed: INotificationFeed):
        self.notification_feed = notification_feed

    async def execute(self) -> List[NotificationDTO]:
        return [
            NotificationDTO.from_domain(notification)
            for notification in self.notification_feed.drain()
        ]
