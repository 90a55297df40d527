# -*- coding: utf-8 -*-
import pytest

from asstools.sklearn_shim import Pipeline
from asstools.version import make_version_tuple


@pytest.mark.parametrize('vstr, expected', [
    ('v0.1.1', (0, 1, 1)),
    ('v1.2.3', (1, 2, 3)),
    ('4.5.6.1', (4, 5, 6, 1)),
    ('1.0.0+local', (1, 0, 0)),
])
def test_version_tuple_from_string(vstr, expected):
    assert make_version_tuple(vstr) == expected


class AddOne:
    def fit(self, X, *_):
        return self

    def transform(self, X):
        return X + 1


def test_pipeline_chains_steps():
    pipe = Pipeline([('a', AddOne()), ('b', AddOne())])
    assert pipe.fit_transform(1) == 3
    assert pipe.transform(5) == 7
    assert len(pipe) == 2
    assert isinstance(pipe['b'], AddOne)
    assert len(pipe[:1]) == 1


@pytest.mark.parametrize('steps', [
    [],
    [('a', AddOne()), ('a', AddOne())],
    [('a', object())],
])
def test_pipeline_rejects_bad_steps(steps):
    with pytest.raises((TypeError, ValueError)):
        Pipeline(steps)
