from fastapi import APIRouter

from ..calculators.catalog import catalog_summary

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("")
def get_catalog():
    """Frame sizes, platform lengths and scaffold systems for the calculator form."""
    return catalog_summary()
