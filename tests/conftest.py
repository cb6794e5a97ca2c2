import matplotlib
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

matplotlib.use("Agg")

from config import DEMO_PATIENT  # noqa: E402
from models import AssessmentInput  # noqa: E402
from storage import MemoryBackend, SqlBackend  # noqa: E402


@pytest.fixture
def demo_input() -> AssessmentInput:
    return AssessmentInput(**DEMO_PATIENT)


@pytest.fixture
def make_input():
    def _make(**overrides) -> AssessmentInput:
        return AssessmentInput(**{**DEMO_PATIENT, **overrides})
    return _make


@pytest.fixture
def memory_backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def sql_backend() -> SqlBackend:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return SqlBackend(engine=engine)


@pytest.fixture(params=["memory", "sql"])
def backend(request, memory_backend, sql_backend):
    return memory_backend if request.param == "memory" else sql_backend
