from fastapi import APIRouter, HTTPException, status

from caesar_breaker.core.exceptions import TableNotFoundError
from caesar_breaker.dependencies import RegistryDep
from caesar_breaker.models.schemas import ErrorResponse, ProbabilityTableSchema, TablesResponse
from caesar_breaker.services.tables.probability import ProbabilityTable

router = APIRouter()


def _to_schema(table: ProbabilityTable) -> ProbabilityTableSchema:
    return ProbabilityTableSchema(
        name=table.name,
        code=table.code,
        probabilities=table.as_dict(),
        total=sum(table.probabilities),
    )


@router.get(
    "",
    response_model=TablesResponse,
    summary="List language tables",
)
async def list_tables(registry: RegistryDep) -> TablesResponse:
    """List the reference letter distributions available for scoring."""
    items = [_to_schema(table) for table in registry.get_all_tables()]
    return TablesResponse(items=items, total=len(items))


@router.get(
    "/{name}",
    response_model=ProbabilityTableSchema,
    responses={
        404: {"model": ErrorResponse, "description": "Language table not found"},
    },
    summary="Get language table",
)
async def get_table(name: str, registry: RegistryDep) -> ProbabilityTableSchema:
    """Get one letter distribution by name or language code."""
    try:
        return _to_schema(registry.get(name))
    except TableNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
