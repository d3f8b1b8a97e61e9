"""Расчёт ставок настольных игр: сик-бо, рулетка, бросок ниже порога."""

__version__ = "0.1.0"
