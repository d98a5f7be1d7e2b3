"""
Technical Tools API Endpoints

Property calculator and application-driven material search.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from plastics_catalog.core.config import settings
from plastics_catalog.db.session import get_db
from plastics_catalog.schemas.common import parse_query
from plastics_catalog.schemas.material import MaterialResponse
from plastics_catalog.schemas.tools import (
    ApplicationSearchParams,
    PropertyCalculatorRequest,
    PropertyCalculatorResult,
)
from plastics_catalog.services.material_search import search_materials
from plastics_catalog.services.property_calculator import (
    application_filters,
    calculate_properties,
)

router = APIRouter()


@router.post("/property-calculator", response_model=PropertyCalculatorResult)
def property_calculator(data: PropertyCalculatorRequest):
    """
    Estimate modulus, stresses and safety factor from basic properties.

    Missing inputs count as zero.
    """
    return calculate_properties(data)


@router.get("/application-search", response_model=List[MaterialResponse])
def application_search(
    response: Response,
    application: Optional[str] = Query(None, description="automotive, medical or electronics"),
    process_temperature: Optional[str] = Query(None, alias="processTemperature"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """
    Materials suited to an application and/or processing temperature.

    - automotive: tensile strength >= 40 MPa, HDT >= 80 °C
    - medical: FDA approved
    - electronics: UL94 V-0
    - processTemperature T: melting temperature within [T - 20, T + 50]
    """
    params = parse_query(ApplicationSearchParams, {
        "application": application,
        "processTemperature": process_temperature,
    })
    filters = application_filters(params.application, params.process_temperature)
    materials, total = search_materials(db, filters, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return materials
