"""
Collision detection system for Classic Pong

All checks are axis-aligned bounding box tests.
"""

from classic_pong.core.entities import Ball, Paddle


def rects_overlap(
    rect_a: tuple[float, float, float, float], rect_b: tuple[float, float, float, float]
) -> bool:
    """Strict overlap test between two (left, top, right, bottom) boxes; touching is not overlap"""
    left_a, top_a, right_a, bottom_a = rect_a
    left_b, top_b, right_b, bottom_b = rect_b
    return left_a < right_b and right_a > left_b and top_a < bottom_b and bottom_a > top_b


def ball_intersects_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Checks whether the ball box overlaps the paddle box"""
    return rects_overlap(ball.get_rect(), paddle.get_rect())


def check_goal(ball: Ball, field_width: float) -> int:
    """
    Checks whether the ball left the field horizontally

    Returns:
        The player credited with the point (2 when the ball passed the left
        edge, 1 when it passed the right edge), or 0 if the ball is in play
    """
    if ball.position.x < 0:
        return 2
    if ball.position.x > field_width:
        return 1
    return 0


def check_ball_walls(ball: Ball, field_height: float) -> str | None:
    """
    Checks the ball against the top and bottom walls

    The top limit is the ball half-size and the bottom limit is
    field_height - ball size.

    Returns:
        "top", "bottom" or None
    """
    if ball.position.y < ball.half_size:
        return "top"
    if ball.position.y > field_height - ball.size:
        return "bottom"
    return None
