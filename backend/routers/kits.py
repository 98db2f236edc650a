from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..catalog.registry import get_kit, get_template, list_kits, list_templates
from ..catalog.templates import DEFAULT_ESTIMATE_AREA_M2, template_estimate

router = APIRouter(prefix="/kits", tags=["kits"])


def _template_to_dict(template, area_m2: float) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "category": template.category,
        "recommended_use": template.recommended_use,
        "features": list(template.features),
        "estimated_cost": template_estimate(template.kit, area_m2),
        "estimate_area_m2": area_m2,
        "kit": asdict(template.kit),
    }


@router.get("/")
def list_predefined_kits():
    return [asdict(kit) for kit in list_kits()]


@router.get("/templates")
def list_kit_templates(category: Optional[str] = None, area_m2: float = DEFAULT_ESTIMATE_AREA_M2):
    try:
        templates = list_templates(category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [_template_to_dict(t, area_m2) for t in templates]


@router.get("/templates/{template_id}")
def get_kit_template(template_id: str, area_m2: float = DEFAULT_ESTIMATE_AREA_M2):
    try:
        template = get_template(template_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Template not found")
    return _template_to_dict(template, area_m2)


@router.get("/{kit_id}")
def get_catalog_kit(kit_id: str):
    try:
        return asdict(get_kit(kit_id))
    except ValueError:
        raise HTTPException(status_code=404, detail="Kit not found")
