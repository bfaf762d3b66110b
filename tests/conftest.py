import pytest

from dfzk.commitments import df_trusted_setup, DamgardFujisakiCommitter


CHALLENGE_SPACE_SIZE = 40


@pytest.fixture(scope="session")
def params():
    return df_trusted_setup(bits=128, security_param=40)


@pytest.fixture(scope="session")
def group(params):
    return params.group


@pytest.fixture
def committer(params):
    committer = DamgardFujisakiCommitter(params)
    committer.commit(5, randomness=7)
    return committer


@pytest.fixture
def k():
    return CHALLENGE_SPACE_SIZE
