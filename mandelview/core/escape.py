from mandelview.core.complex_num import ComplexNum

ESCAPE_RADIUS_SQR = 4.0
# Points that never escape report this count so they share the base color.
IN_SET = 0

def escape_time(c: ComplexNum, max_iter: int) -> int:
    """Return the iteration at which the orbit of ``c`` leaves |z| <= 2.

    Orbits that survive ``max_iter`` steps are in the set and report ``IN_SET``.
    """
    z = ComplexNum(0.0, 0.0)
    n = 0
    while n < max_iter:
        z = z.squared().add(c)
        if z.norm_sqr() > ESCAPE_RADIUS_SQR:
            return n
        n += 1
    return IN_SET
