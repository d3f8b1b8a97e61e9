from typing import List, Union


def format_amount(amount: int) -> str:
    """Форматирование суммы с разделителями тысяч"""
    return f"{amount:,}"


def format_outcome(outcome: Union[int, List[int]]) -> str:
    """Человекочитаемый результат броска"""
    if isinstance(outcome, list):
        return ' '.join(f"🎲{face}" for face in outcome)
    return str(outcome)
