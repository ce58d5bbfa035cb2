from .pillow import buffer_to_image, image_to_buffer

__all__ = ["buffer_to_image", "image_to_buffer"]
