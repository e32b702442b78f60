import pytest


@pytest.fixture
def write_plan(tmp_path):
    """Grava um plano YAML em tmp_path e devolve o caminho."""

    def _write(text: str, name: str = "plano.yml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
