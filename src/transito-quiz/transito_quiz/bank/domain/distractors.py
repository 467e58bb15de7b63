"""Distractor synthesis: plausible wrong options drawn from a label pool."""

from collections.abc import Iterable, Sequence

from transito_quiz.bank.domain.random_source import RandomSource

DISTRACTOR_COUNT = 3

# Generic sign names used when the pool cannot supply enough distinct labels.
FALLBACK_LABELS: tuple[str, ...] = (
    "Pare",
    "Ceda el paso",
    "Prohibido girar a la izquierda",
    "Prohibido girar a la derecha",
    "Prohibido parquear",
    "Velocidad máxima permitida",
    "Zona escolar",
    "Curva peligrosa a la derecha",
    "Curva peligrosa a la izquierda",
    "Paso peatonal",
    "Vía en construcción",
    "Doble vía",
)


def synthesize_distractors(
    correct: str,
    pool: Iterable[str],
    rng: RandomSource,
    fallback: Sequence[str] = FALLBACK_LABELS,
    count: int = DISTRACTOR_COUNT,
) -> list[str]:
    """
    Return up to `count` distinct labels from pool, none equal to correct.

    Pool labels are drawn at random; when the pool runs dry the fallback
    labels are used in order. Fewer than `count` labels are returned when
    both are exhausted. The result carries no ordering guarantee.
    """
    target = correct.strip()
    candidates: list[str] = []
    seen: set[str] = {target}
    for label in pool:
        text = label.strip()
        if text and text not in seen:
            seen.add(text)
            candidates.append(text)

    rng.shuffle(candidates)
    chosen = candidates[:count]

    for label in fallback:
        if len(chosen) >= count:
            break
        text = label.strip()
        if text and text != target and text not in chosen:
            chosen.append(text)

    return chosen
