"""Book model, serializers and packaging."""
