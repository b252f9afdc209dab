#!/usr/bin/env python3
from controlled_loop.core.cursor import create_cursor

def show(value, key, cursor):
    print(f"key: {key} value: {value}")
    return value

def demo(controller=show):
    items = [1, 2, 3, 4, 5]
    mapping = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}

    forward = create_cursor(items, controller).run()
    # same walk, last key first
    backward = create_cursor(mapping, controller).reverse(reset=True).run()
    return forward, backward

if __name__ == "__main__":
    demo()
