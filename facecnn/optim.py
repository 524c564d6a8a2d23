"""The AdamW optimiser with decoupled weight decay."""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np


class AdamW:
    """Updates named parameter arrays in place from named gradients."""

    def __init__(
        self,
        params: Mapping[str, np.ndarray],
        lr: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
        weight_decay: float = 0.01,
    ) -> None:
        self.params = dict(params)
        self.lr = lr
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps
        self.weight_decay = weight_decay
        self.step_count = 0
        self._first = {name: np.zeros_like(value) for name, value in self.params.items()}
        self._second = {name: np.zeros_like(value) for name, value in self.params.items()}

    def step(self, grads: Mapping[str, np.ndarray]) -> None:
        """Apply one update; parameters without a gradient are left alone."""
        unknown = [name for name in grads if name not in self.params]
        if unknown:
            raise KeyError(f"gradients for unknown parameters: {', '.join(unknown)}")
        for name, grad in grads.items():
            if np.shape(grad) != self.params[name].shape:
                raise ValueError(f"gradient shape mismatch for {name}")
        self.step_count += 1
        correction1 = 1.0 - self.beta1**self.step_count
        correction2 = 1.0 - self.beta2**self.step_count
        decay = 1.0 - self.lr * self.weight_decay
        for name, grad in grads.items():
            param = self.params[name]
            grad = np.asarray(grad, dtype=param.dtype)
            first, second = self._first[name], self._second[name]
            first *= self.beta1
            first += (1.0 - self.beta1) * grad
            second *= self.beta2
            second += (1.0 - self.beta2) * grad * grad
            adjusted = (first / correction1) / (np.sqrt(second / correction2) + self.eps)
            param *= decay
            param -= (self.lr * adjusted).astype(param.dtype)