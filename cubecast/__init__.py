"""Ray-casting game core: map geometry, canvas drawing, entities, minimap, key codes and text, byte and list helpers."""

__version__ = "0.1.0"