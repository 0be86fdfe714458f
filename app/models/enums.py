import enum


class EggQuality(str, enum.Enum):
    A = "A"
    B = "B"
    cracked = "cracked"


class ExpenseType(str, enum.Enum):
    medication = "medication"
    electricity = "electricity"
    labor = "labor"
    other = "other"
