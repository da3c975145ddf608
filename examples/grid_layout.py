"""Example: a 2x3 grid with one empty cell, laid out in the diagram root."""

from hintlayout import LayoutContext


def main() -> None:
    ctx = LayoutContext()
    a = ctx.rectangle(width=100, height=50, label="A")
    b = ctx.rectangle(width=160, height=50, label="B")
    c = ctx.rectangle(width=80, height=90, label="C")
    d = ctx.rectangle(label="D")
    e = ctx.rectangle(label="E")

    grid = ctx.grid([[a, b, c], [d, None, e]]).layout()
    solution = ctx.solve()

    print("Column widths:", grid.column_widths())
    print("Row heights:", grid.row_heights())
    for symbol in (a, b, c, d, e):
        values = solution[symbol]
        print(f"{symbol.label}: ({values.x:.1f}, {values.y:.1f}) {values.width:.1f}x{values.height:.1f}")

    spanning = grid.area(0, 0, 2, 2)
    print(f"Cells [0,2)x[0,2): x {spanning.left.value():.1f}..{spanning.right.value():.1f}")


if __name__ == "__main__":
    main()
