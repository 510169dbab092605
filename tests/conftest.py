import os

import pytest


@pytest.fixture
def prj_4326():
    return _data_file('fixtures/4326.prj')


@pytest.fixture
def prj_2249():
    return _data_file('fixtures/2249.prj')


@pytest.fixture
def prj_pulkovo():
    return _data_file('fixtures/pulkovo.prj')


@pytest.fixture
def wgs84(prj_4326):
    with open(prj_4326) as fp:
        return fp.read()


@pytest.fixture
def nested():
    return 'GEOGCS["t",DATUM["d",SPHEROID["s",1,2]]]'


def _data_file(name):
    cur_dir = os.path.dirname(os.path.realpath(__file__))
    return os.path.join(cur_dir, name)
