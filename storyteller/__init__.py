"""Busan history storyteller: place + emotion to story, images and nearby places."""
