"""Widgets that render into a buffer: blocks, bar charts, and a canvas with its shapes."""