QUOTE = '"'


def split_record(line: str, delimiter: str = ",") -> list[str]:
    """
    Splits one line of delimited text into trimmed fields.

    Quote-aware, so a title may contain the delimiter:
      "CSCI200","Data Structures, with Labs",CSCI100
        → ["CSCI200", "Data Structures, with Labs", "CSCI100"]

    Inside quotes a doubled quote ("") is a literal quote character.
    An unterminated quote simply runs to end of line; no error is raised.
    The last field is always emitted, so '' → [''] and 'A,' → ['A', ''].
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current).strip())
    return fields
