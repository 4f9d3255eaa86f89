"""Widget base classes, layouts, grids, painters, text and icons, transforms and dialogs."""