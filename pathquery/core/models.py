from typing import Dict, List
from pydantic import BaseModel


class ValidationReport(BaseModel):
    is_valid: bool
    errors: List[str] = []
    warnings: Dict[str, List[str]] = {}
