"""
Core: санитизация ввода, грамматика чисел, подсчёт значащих цифр и округление.

Модули не зависят от внешних систем (UI, хранилища истории) и не держат
состояния между вызовами.
"""
