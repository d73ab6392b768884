from enum import Enum


class Kind(str, Enum):
    MAPPING = "mapping"
    ENTITY = "entity"
    SCALAR = "scalar"
