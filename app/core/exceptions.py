"""
Custom exceptions
"""


class DateExpressionError(Exception):
    """Erro ao interpretar uma expressão de data por extenso"""
    pass


class FirestoreError(Exception):
    """Erro nas operações do Firestore"""
    pass
