import gmath as gm
from gmath.utils import logger, Config


def a_v(a: float, v: gm.Vector) -> gm.Vector:
    """a * V через явную функцию."""
    return gm.scale(v, a)


if __name__ == "__main__":
    Config().apply_logging()
    logger.info("Starting vector example...")

    p1 = gm.Vector.new_2d(1.0, 0.5)
    p2 = gm.Vector.new_2d(2.4, 3.9)
    p3 = gm.Vector.new_2d(1.0, 0.5 - 1.0e-16)
    # здесь начинается потеря точности
    p4 = gm.Vector.new_2d(1.0, 0.5 - 1.0e-17)

    print(f"add: {p1} + {p2} -> {p1 + p2}")
    print(f"sub: {p1} - {p2} -> {p1 - p2}")
    print(f"cross: {p1} x {p2} -> {(p1 ^ p2).z}")
    print(f"cross: {p2} x {p1} -> {(p2 ^ p1).z}")
    print(f"dot: {p1} . {p2} -> {p1.dot(p2)}")
    print(f"dot: {p2} . {p1} -> {p2.dot(p1)}")

    print(f"length^2: {p1} . {p1} -> {p1.dot(p1)}")

    print(f"V * a: {p1} * 1.5 -> {p1 * 1.5}")
    print(f"V * a * b: {p1} * 1.5 * 1.1 -> {p1 * 1.5 * 1.1}")

    print(f"function: 1.5 * {p1} + {p2} -> {a_v(1.5, p1) + p2}")
    print(f"operator: 1.5 * {p1} + {p2} -> {1.5 * p1 + p2}")

    print(f"eq: {p1} == {p2} -> {p1 == p2}")
    print(f"ne: {p1} != {p2} -> {p1 != p2}")
    print(f"eq: {p1} == {p1} -> {p1 == p1}")

    print("E-16")
    print(f"eq (precision): {p1} == {p3} -> {p1 == p3}")
    print("E-17")
    print(f"eq (precision): {p1} == {p4} -> {p1 == p4}")
