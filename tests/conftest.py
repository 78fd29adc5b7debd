import pytest


def _p6(w, h, body, maxval=255):
    return f"P6 {w} {h} {maxval}\n".encode("ascii") + bytes(body)


def _p3(w, h, values, maxval=255, per_line=6):
    lines = []
    for i in range(0, len(values), per_line):
        lines.append(" ".join(str(v) for v in values[i : i + per_line]))
    return f"P3 {w} {h} {maxval}\n".encode("ascii") + "\n".join(lines).encode(
        "ascii"
    ) + b"\n"


@pytest.fixture
def make_p6():
    return _p6


@pytest.fixture
def make_p3():
    return _p3


@pytest.fixture
def sample_values():
    # 3×2: każda składowa inna
    return [(i * 37) % 256 for i in range(3 * 2 * 3)]


@pytest.fixture
def example_p3():
    return b"P3 2 1 255\n255 0 0 0 255 0\n"


@pytest.fixture
def ppm_file(tmp_path, example_p3):
    path = tmp_path / "example.ppm"
    path.write_bytes(example_p3)
    return path
