from sqlalchemy.orm import DeclarativeBase

# Rango de INTEGER en SQLite (entero con signo de 64 bits)
MAX_INTEGER = 2**63 - 1


class Base(DeclarativeBase):
    pass
