"""배치 레이아웃 모듈: 병합·그리드 배치에서 각 이미지의 위치를 계산한다.

픽셀은 건드리지 않고 크기와 좌표만 다룬다.
"""

from enum import Enum


class Direction(Enum):
    """이미지를 이어 붙이는 축."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(Enum):
    """교차축 정렬 방식."""
    START = "start"     # 위 (가로 병합) / 왼쪽 (세로 병합)
    CENTER = "center"
    END = "end"         # 아래 (가로 병합) / 오른쪽 (세로 병합)


def cross_offset(alignment: Alignment, cross_total: int, cross_size: int) -> int:
    """교차축 오프셋을 반환한다. CENTER는 내림 나눗셈 (반올림하지 않음)."""
    if alignment is Alignment.START:
        return 0
    if alignment is Alignment.CENTER:
        return (cross_total - cross_size) // 2
    return cross_total - cross_size


def linear_layout(
    sizes: list[tuple[int, int]],
    direction: Direction,
    alignment: Alignment,
    gap: int = 0,
) -> tuple[tuple[int, int], list[tuple[int, int]]]:
    """이미지 크기 목록으로 병합 결과 크기와 각 이미지의 (x, y)를 계산한다.

    Returns:
        ((전체 폭, 전체 높이), [(x, y), ...])
    """
    if not sizes:
        return (0, 0), []

    horizontal = direction is Direction.HORIZONTAL
    mains = [w if horizontal else h for w, h in sizes]
    crosses = [h if horizontal else w for w, h in sizes]

    main_total = sum(mains) + gap * (len(sizes) - 1)
    cross_total = max(crosses)

    positions = []
    offset = 0
    for main, cross in zip(mains, crosses):
        c = cross_offset(alignment, cross_total, cross)
        positions.append((offset, c) if horizontal else (c, offset))
        offset += main + gap

    total = (main_total, cross_total) if horizontal else (cross_total, main_total)
    return total, positions


def grid_layout(
    sizes: list[tuple[int, int]],
    columns: int,
    gap: int = 0,
) -> tuple[tuple[int, int], list[tuple[int, int]]]:
    """균일 셀 그리드의 전체 크기와 각 이미지의 (x, y)를 계산한다.

    셀 크기는 전체 이미지의 최대 폭·최대 높이 하나로 공유하고,
    각 이미지는 셀 안에서 중앙 배치한다 (행 우선 순서).
    """
    if not sizes or columns <= 0:
        return (0, 0), []

    rows = (len(sizes) + columns - 1) // columns
    cell_w = max(w for w, _ in sizes)
    cell_h = max(h for _, h in sizes)

    total_w = columns * cell_w + (columns - 1) * gap
    total_h = rows * cell_h + (rows - 1) * gap

    positions = []
    for i, (w, h) in enumerate(sizes):
        row, col = divmod(i, columns)
        x = col * (cell_w + gap) + (cell_w - w) // 2
        y = row * (cell_h + gap) + (cell_h - h) // 2
        positions.append((x, y))

    return (total_w, total_h), positions
