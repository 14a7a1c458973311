"""Character, conversion, output, string, printf, linked-list and line-reading helpers."""