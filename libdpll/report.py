""" Text output of simulation results, one line per sample
"""

HEADER_LABELS = ("index", "real(x)", "imag(x)", "real(y)", "imag(y)", "error")


def format_coefs(coefs):
    """ Loop filter coefficients as two comment lines
    """
    return [
        "#  b = [b0:%12.8f, b1:%12.8f, b2:%12.8f]"%(coefs.b0, coefs.b1, coefs.b2),
        "#  a = [a0:%12.8f, a1:%12.8f, a2:%12.8f]"%(coefs.a0, coefs.a1, coefs.a2),
    ]

def format_header():
    index, *cols = HEADER_LABELS
    return "# %-6s "%index + "".join("%-12.8s "%c for c in cols)

def format_row(row):
    return "%6d %12.8f %12.8f %12.8f %12.8f %12.8f"%(
        row.index, row.x.real, row.x.imag, row.y.real, row.y.imag, row.error)

def write_rows(rows, stream):
    """ Write header and rows to stream as they are produced
        returns:
            number of data rows written
    """
    stream.write(format_header() + "\n")
    n = 0
    for row in rows:
        stream.write(format_row(row) + "\n")
        n += 1
    return n
