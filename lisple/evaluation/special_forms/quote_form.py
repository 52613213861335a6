from lisple.errors import MalformedFormError


def quote_form(tail, env, loader, evaluate_fn):
    if len(tail) != 1:
        raise MalformedFormError("quote", f"expects exactly 1 operand, got {len(tail)}")
    return tail[0]
