"""Page extractors: listing pages to stubs, detail pages to full records."""
