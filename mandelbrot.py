def iterate(c: complex, max_iterations: int) -> int:
    cr, ci = c.real, c.imag
    zr = zi = 0.0
    n = 0
    while n < max_iterations and zr*zr + zi*zi < 4.0:
        zr, zi = zr*zr - zi*zi + cr, 2.0*zr*zi + ci
        n += 1
    return n


def color_of(n: int, max_iterations: int) -> tuple[int, int, int]:
    # interior points are black
    if n == max_iterations:
        return (0, 0, 0)
    return ((n*50) % 255, (n*30) % 255, (n*20) % 255)
