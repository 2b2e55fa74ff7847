"""Default collaborators implementing the application ports."""
