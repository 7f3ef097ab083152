"""Sub-package reserved for logging and the journal of processed files; it holds no modules."""