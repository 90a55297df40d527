# -*- coding: utf-8 -*-
"""
Minimal stand-ins for ``TransformerMixin`` and ``Pipeline`` from
scikit-learn (BSD 3-Clause, Copyright (c) 2007-2022 The scikit-learn
developers), reduced to the fit / transform chaining used to read a script
and run it through a transformer.
"""
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from typing_extensions import Protocol


class TransformerProtocol(Protocol):
    fit: Callable[..., "TransformerProtocol"]
    transform: Callable[[Any], Any]


class TransformerMixin(TransformerProtocol):
    """Mixin class for all transformers."""

    def fit_transform(self, X: Any, y: Optional[Any] = None, **fit_params: Any) -> Any:
        """Fit to X, then return the transformed version of X."""
        if y is None:
            return self.fit(X, **fit_params).transform(X)
        else:
            return self.fit(X, y, **fit_params).transform(X)


class Pipeline:
    def __init__(self, steps: Sequence[Tuple[str, TransformerProtocol]]) -> None:
        self.steps: List[Tuple[str, TransformerProtocol]] = list(steps)
        self._validate_steps()

    def _validate_steps(self) -> None:
        if not self.steps:
            raise ValueError('Pipeline needs at least one step')
        names = [name for name, _ in self.steps]
        if len(set(names)) != len(names):
            raise ValueError('Pipeline step names must be unique: %s' % names)
        for name, t in self.steps:
            if not hasattr(t, 'fit') or not hasattr(t, 'transform'):
                raise TypeError(
                    "All steps should be transformers and implement fit and "
                    "transform; '%s' (type %s) doesn't" % (name, type(t))
                )

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, ind):
        if isinstance(ind, slice):
            if ind.step not in (1, None):
                raise ValueError('Pipeline slicing only supports a step of 1')
            return self.__class__(self.steps[ind])
        try:
            name, est = self.steps[ind]
        except TypeError:
            # Not an int, try get step by name
            return self.named_steps[ind]
        return est

    @property
    def named_steps(self) -> Dict[str, TransformerProtocol]:
        return dict(self.steps)

    def fit(self, X: Any, *_) -> 'Pipeline':
        self.fit_transform(X)
        return self

    def fit_transform(self, X: Any, *_) -> Any:
        Xt = X
        for _, transformer in self.steps:
            if hasattr(transformer, 'fit_transform'):
                Xt = transformer.fit_transform(Xt)
            else:
                Xt = transformer.fit(Xt).transform(Xt)
        return Xt

    def transform(self, X: Any) -> Any:
        Xt = X
        for _, transformer in self.steps:
            Xt = transformer.transform(Xt)
        return Xt


def _name_estimators(estimators: Sequence[Any]) -> List[Tuple[str, Any]]:
    """Generate names for estimators."""
    names = [type(estimator).__name__.lower() for estimator in estimators]
    namecount: Dict[str, int] = defaultdict(int)
    for name in names:
        namecount[name] += 1

    for k, v in list(namecount.items()):
        if v == 1:
            del namecount[k]

    for i in reversed(range(len(estimators))):
        name = names[i]
        if name in namecount:
            names[i] += "-%d" % namecount[name]
            namecount[name] -= 1

    return list(zip(names, estimators))


def make_pipeline(*steps: Any) -> Pipeline:
    """Construct a Pipeline, naming each step after the lowercase of its type."""
    return Pipeline(_name_estimators(steps))
