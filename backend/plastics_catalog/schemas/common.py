"""
Shared pydantic base for API schemas

Field names are snake_case in Python and camelCase on the wire
(``tensile_strength`` <-> ``tensileStrength``). Input is accepted in either
form.
"""
from decimal import Decimal
from typing import Annotated, Any, Dict, Type, TypeVar

from pydantic import BaseModel, PlainSerializer, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from plastics_catalog.exceptions import ValidationError as CatalogValidationError
from plastics_catalog.exceptions import validation_error_details

# NUMERIC column values: exact Decimal inside, plain number in JSON
JSONDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model serializing to camelCase JSON"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class QueryModel(CamelModel):
    """
    Query-string parameters parsed as a model.

    Blank values (``?densityMin=``) count as not given. NaN and infinity
    are rejected.
    """

    model_config = {"allow_inf_nan": False}

    @model_validator(mode="before")
    @classmethod
    def blank_strings_are_unset(cls, data):
        if isinstance(data, dict):
            return {
                k: v for k, v in data.items()
                if v is not None and not (isinstance(v, str) and not v.strip())
            }
        return data


Q = TypeVar("Q", bound=QueryModel)


def parse_query(model: Type[Q], params: Dict[str, Any]) -> Q:
    """
    Validate raw query parameters (keyed by their camelCase names).

    Raises:
        ValidationError: 400 listing every bad parameter
    """
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise CatalogValidationError(errors=validation_error_details(e.errors()))
