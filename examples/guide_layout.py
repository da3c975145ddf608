"""Example: guides shared by a column and a row of symbols."""

import logging

from hintlayout import LayoutContext


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    ctx = LayoutContext()
    header = ctx.rectangle(width=300, height=40, label="Header")
    column = [ctx.rectangle(width=w, height=40, label=f"Item {i}") for i, w in enumerate((80, 140, 110))]
    footer = ctx.rectangle(width=200, height=30, label="Footer")

    ctx.hints.pin(header, x=0, y=0)
    ctx.guide_x().follow_left(header).align_left(*column).arrange(gap=10)
    ctx.guide_y(value=260).align_bottom(footer)
    ctx.guide_x().follow_center(header).align_center(footer)
    ctx.hints.arrange_vertical([header, column[0]], gap=20)

    solution = ctx.solve()
    for symbol in (header, *column, footer):
        values = solution[symbol]
        print(f"{symbol.label:<8} left={values.x:7.2f} top={values.y:7.2f} right={values.right:7.2f}")


if __name__ == "__main__":
    main()
