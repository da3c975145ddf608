"""Example: a row of boxes enclosed in a titled container."""

from hintlayout import LayoutContext


def main() -> None:
    ctx = LayoutContext()
    boundary = ctx.container(header=30, label="System")
    boxes = [ctx.rectangle(width=120, height=60, label=name) for name in ("Login", "Browse", "Checkout")]

    ctx.arrange(*boxes).margin(20).horizontal()
    ctx.align(*boxes).center_y()
    ctx.enclose(*boxes).in_(boundary)
    ctx.enclose(boundary).layout()

    solution = ctx.solve()
    print(f"Solver constraints: {ctx.solver.constraint_count}")
    for symbol in (ctx.diagram, boundary, *boxes):
        values = solution[symbol]
        print(
            f"{symbol.id:<24} x={values.x:8.2f} y={values.y:8.2f} "
            f"w={values.width:8.2f} h={values.height:8.2f} z={values.z:5.1f}"
        )


if __name__ == "__main__":
    main()
