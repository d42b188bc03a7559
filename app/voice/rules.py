"""
Regras ordenadas de padrão (predicado + extrator), primeira que casar vence.
"""
from typing import Any, Callable, Iterable, NamedTuple, Optional, Tuple


class Rule(NamedTuple):
    """
    Uma regra da cascata.

    predicate: recebe o texto (já em minúsculas) e diz se a regra se aplica.
    extract: recebe o mesmo texto e devolve o valor da regra.
    """
    name: str
    predicate: Callable[[str], bool]
    extract: Callable[[str], Any]


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Predicado: o texto contém alguma das palavras-chave"""
    return lambda text: any(k in text for k in keywords)


def constant(value: Any) -> Callable[[str], Any]:
    return lambda text: value


def first_match(rules: Iterable[Rule], text: str) -> Optional[Tuple[str, Any]]:
    """
    Avalia as regras na ordem e retorna (nome, valor) da primeira que casar.
    Uma regra cujo extrator devolve None ou "" é tratada como não casada.
    """
    for rule in rules:
        if not rule.predicate(text):
            continue
        value = rule.extract(text)
        if value is None or value == "":
            continue
        return rule.name, value
    return None


def matches(pattern) -> Callable[[str], bool]:
    """Predicado: a regex compilada encontra algo no texto"""
    return lambda text: bool(pattern.search(text))


def search_group(pattern, group: int = 0) -> Callable[[str], Optional[str]]:
    """Extrator: devolve o grupo da primeira ocorrência da regex"""
    def extract(text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(group) if match else None
    return extract
