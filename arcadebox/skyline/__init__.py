"""Rooftop side-scroller parts: configuration, buildings, player, timer and buttons."""