import pytest

from homatrix import Matrix, render_matrix
from homatrix.view.rendering import format_cell


def test_identity():
    expected = (
        "/ 1 0 0 0 \\\n"
        "| 0 1 0 0 |\n"
        "| 0 0 1 0 |\n"
        "\\ 0 0 0 1 /"
    )
    assert str(Matrix.identity()) == expected
    assert render_matrix(Matrix.identity()) == expected


def test_empty():
    assert str(Matrix.empty()).splitlines() == ["/ \\", "| |", "| |", "\\ /"]


def test_point_list():
    m = Matrix([(0.5, -2.0, 3.25, 1.0), (4.0, 5.0, 6.0, 1.0)])
    assert str(m).splitlines() == [
        "/ 0.5 4 \\",
        "| -2 5 |",
        "| 3.25 6 |",
        "\\ 1 1 /",
    ]


@pytest.mark.parametrize(
    "value, text",
    [(1.0, "1"), (0.0, "0"), (-0.0, "-0"), (0.1, "0.1"), (-12.5, "-12.5"), (1e20, "100000000000000000000")],
)
def test_format_cell(value, text):
    assert format_cell(value) == text


def test_repr():
    assert repr(Matrix.origin()) == "Matrix([(0.0, 0.0, 0.0, 1.0)])"
