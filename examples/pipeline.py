"""
Small record-cleaning pipeline built from curried helpers.

This example shows:
1. Curried accessors used as chain steps
2. A tuple result spread into the next step
3. passthrough() keeping a list whole
4. A trace of every step
"""

from funcwright import Trace, compose, condition, curry, passthrough, prop, when

RECORDS = [
    {"name": " Ada ", "score": 91},
    {"name": "bo", "score": 48},
    {"name": "Cy", "score": None},
]


@curry
def clamp(low, high, value):
    return max(low, min(high, value))


def split_name(record):
    return record["name"].strip().title(), record["score"] or 0


def grade(name, score):
    return {"name": name, "grade": condition(lambda s: s >= 50, lambda s: "pass", lambda s: "fail", score)}


def main() -> None:
    trace = Trace()
    clean = compose(grade, lambda name, score: (name, clamp(0, 100, score)), split_name, trace=trace)
    graded = [clean(record) for record in RECORDS]
    print(graded)

    names = compose(passthrough(len), lambda rows: [prop("name", r) for r in rows])
    print("records:", names(graded))

    shout = when(lambda g: g["grade"] == "fail", lambda g: {**g, "name": g["name"].upper()})
    print([shout(g) for g in graded])

    for event in trace.find_all(action="step")[:3]:
        print(event.info["index"], event.info["step"], f"{event.duration_ms:.3f}ms")


if __name__ == "__main__":
    main()
