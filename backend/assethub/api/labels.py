"""Label generator discovery."""

from fastapi import APIRouter, Depends

from assethub.dependencies import get_label_generation
from assethub.schemas.common import CamelModel
from assethub.services import LabelGenerationService

router = APIRouter(prefix="/labels", tags=["labels"])


class LabelGeneratorResponse(CamelModel):
    id: str
    name: str
    media_type: str


@router.get("/generators", response_model=list[LabelGeneratorResponse])
def list_label_generators(
    labels: LabelGenerationService = Depends(get_label_generation),
) -> list[LabelGeneratorResponse]:
    """List the generators usable in ``/{entity}/{token}/label/{generatorId}``."""
    return [
        LabelGeneratorResponse(id=g.id, name=g.name, media_type=g.media_type)
        for g in labels.list_generators()
    ]
