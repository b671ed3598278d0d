from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool


def make_engine(url, echo=False):
    """Engine for the country store.

    SQLite gets a single shared connection so ``sqlite://`` (in-memory)
    keeps its data across checkouts; everything else is a regular pool.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        future=True,
    )
