"""imagefit: display-size resolution for images with partial dimensions."""
