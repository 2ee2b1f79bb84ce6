import pytest

from climate_samples import climate_lines


@pytest.fixture
def climate_file(tmp_path):
    path = tmp_path / "climatedata"
    path.write_text("\n".join(climate_lines()) + "\n\n")
    return path
