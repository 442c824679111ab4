import matplotlib

# Headless backend for the rendering tests
matplotlib.use("Agg")
