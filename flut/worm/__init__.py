"""A worm game built from flut widgets."""