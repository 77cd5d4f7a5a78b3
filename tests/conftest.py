import pytest

from lisn.types.cell import Cell


# Nested Python lists stand in for Cell chains in the expected values below,
# so tables can be written as ["map", ["a", 1]] instead of Cell("map", Cell(...)).
def to_cells(expr):
    if isinstance(expr, list):
        return Cell.from_list([to_cells(e) for e in expr])
    return expr


@pytest.fixture
def cells():
    return to_cells


@pytest.fixture
def strict():
    return {"strict": True}
