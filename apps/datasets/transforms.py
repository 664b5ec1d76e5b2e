# transforms.py

"""
Purpose:
  Reshape parsed CSV rows into the point lists the chart renderers take.

Functions:
  - count_by_category  (rows -> pie/bar points)
  - project_fields     (rows -> line/scatter points)

Columns are not checked here. A column that doesn't exist just produces
None values, and the renderer's own field check reports it.
"""


def count_by_category(rows, column):
    """
    Count rows per distinct value of `column`.

    One point per category, in order of first appearance:
      {"name": category, "value": count, "color": category.lower()}
    """
    counts = {}
    for row in rows:
        category = row.get(column)
        counts[category] = counts.get(category, 0) + 1

    points = []
    for category, count in counts.items():
        points.append({
            "name": category,
            "value": count,
            "color": category.lower() if isinstance(category, str) else None,
        })
    return points


def project_fields(rows, x, y, label=None):
    """
    One point per row, with x / y / label copied from the named columns.
    Values are not converted; CSV strings stay strings.
    """
    return [
        {
            "x": row.get(x),
            "y": row.get(y),
            "label": row.get(label) if label is not None else None,
        }
        for row in rows
    ]
