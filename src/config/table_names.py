from enum import Enum


class TableNames(str, Enum):
    GUESTS = "Guests"
    FAMILIES = "Families"
