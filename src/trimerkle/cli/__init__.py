"""TriMerkle command line interface."""
