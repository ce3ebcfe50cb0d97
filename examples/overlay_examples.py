"""Walk through base layers and a point overlay, saving each map to HTML."""

from geotrack import OccurrenceClient, build_base_map, clean_occurrences


def main() -> None:
    # Two base layers and a control to switch between them
    print("=== Base layers ===")
    canvas = build_base_map()
    canvas.map.save("base_layers.html")
    print("  saved base_layers.html (Topo + Sat)")

    # Occurrence records of a native sunflower
    print("\n=== Heliomeris multiflora occurrences ===")
    with OccurrenceClient() as gbif:
        records = gbif.search(genus="Heliomeris", species="multiflora", limit=300)
    occurrences = clean_occurrences(records)
    print(f"  {len(records)} records, {len(occurrences)} with coordinates, year and institution")

    if not occurrences:
        print("  Nothing to draw.")
        return

    # Markers in their own group, toggled from the layer control
    canvas = build_base_map(overlay_groups=("Occurrences",))
    for r in occurrences:
        canvas.add_marker(r.latitude, r.longitude, r.institution_code, "Occurrences")
    canvas.map.save("occurrences.html")
    print("  saved occurrences.html")

    # Fixed-size circle markers read better for dense points
    canvas = build_base_map(overlay_groups=("Occurrences",))
    for r in occurrences:
        canvas.add_circle_marker(r.latitude, r.longitude, f"{r.institution_code} ({r.year})", "Occurrences")
    canvas.map.save("occurrences_circles.html")
    print("  saved occurrences_circles.html")


if __name__ == "__main__":
    main()
