from __future__ import annotations

from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import NOTHING_THERE, whole
from bsl.types.forms import Cond, ExprError, is_expr
from bsl.types.sexp import BoolAtom, IdAtom, NumAtom, ReadError, SExpList, StringAtom

_CLAUSE_EXPECTED = "cond: expected a clause with a question and an answer, but found "


def cond_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """
    (cond [question answer] ... [else answer])
    Every clause is a two-element list; an `else` clause may only come last.
    """

    def error(message: str) -> ExprError:
        return ExprError(message, whole("cond", tail))

    if not tail:
        return error(f"cond: expected a clause after cond, but {NOTHING_THERE}")

    clauses = []
    last = len(tail) - 1
    for i, clause in enumerate(tail):
        match clause:
            case ReadError():
                return clause
            case NumAtom():
                return error(_CLAUSE_EXPECTED + "a number")
            case StringAtom():
                return error(_CLAUSE_EXPECTED + "a string")
            case BoolAtom():
                return error(_CLAUSE_EXPECTED + "a boolean")
            case IdAtom():
                return error(_CLAUSE_EXPECTED + "something else")
            case SExpList(items=()):
                return error(_CLAUSE_EXPECTED + "an empty part")
            case SExpList(items=(_,)):
                return error(_CLAUSE_EXPECTED + "a clause with only one part")
            case SExpList(items=(IdAtom(value="else"), answer_sexp)):
                if i != last:
                    return error("cond: found an else clause that isn't the last clause in its cond expression")
                answer = parse_expr(answer_sexp)
                if not is_expr(answer):
                    return answer
                return Cond(tuple(clauses), answer)
            case SExpList(items=(question_sexp, answer_sexp)):
                question = parse_expr(question_sexp)
                if not is_expr(question):
                    return question
                answer = parse_expr(answer_sexp)
                if not is_expr(answer):
                    return answer
                clauses.append((question, answer))
            case SExpList(items=items):
                return error(_CLAUSE_EXPECTED + f"a clause with {len(items)} parts")

    return Cond(tuple(clauses))
