"""
Built-in book collections and translator identifiers.

Each collection maps to the SuttaCentral identifiers of its suttas, in reading
order. Authors are SuttaCentral ``author_uid`` values.
"""

BOOKS: dict[str, list[str]] = {
    "dn": [f"dn{i}" for i in range(1, 35)],
    "mn": [f"mn{i}" for i in range(1, 153)],
    "kp": [f"kp{i}" for i in range(1, 10)],
    "iti": [f"iti{i}" for i in range(1, 113)],
}

AUTHORS: list[str] = [
    "sujato",
    "bodhi",
    "thanissaro",
    "horner",
    "walshe",
    "brahmali",
    "anandajoti",
    "nyanamoli",
]
