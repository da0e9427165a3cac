# SPDX-License-Identifier: Apache-2.0
"""Progress reporting for batch translation."""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

ProgressStage = Literal["translate"]

TRANSLATE_STAGE: ProgressStage = "translate"


@runtime_checkable
class ProgressCallback(Protocol):
    """Receives one notification per settled target language.

    ``completed`` counts targets that have finished, successfully or not,
    so it runs from 1 to ``total`` in completion order. ``target_code`` is
    the language that just settled. Exceptions raised here are logged and
    never change a translation result.
    """

    def __call__(
        self,
        stage: ProgressStage,
        completed: int,
        total: int,
        target_code: str = "",
    ) -> None: ...
