"""rom-picker -- pick the best matching ROM file for each title in a wanted list.

Core modules:
    config  -- Picker configuration via pydantic-settings (.env < env vars <
               kwargs). Threshold validation and loguru setup with a per-run
               log file name.
    cli     -- Click CLI entry point. CLI options passed as kwargs to
               PickerConfig. Secondary pass confirmed via prompt or
               --rescan/--no-rescan.
    runner  -- Two-pass orchestration: primary threshold over the whole list,
               then an optional lower-threshold rescan of the misses only.
    scan    -- One pass: normalize, score, rank and copy per title. Empty
               titles are skipped, copy failures are reported and not retried.
    inputs  -- Wanted-list reader (first 100 non-empty lines) and flat
               candidate-directory snapshot.
    models  -- Dataclasses, enums and tuning constants.
    errors  -- Exception hierarchy (fatal config/input errors, per-title
               copy errors).

Subpackages:
    matching -- Normalizer, Levenshtein similarity, disambiguation, ranking
    ops      -- File delivery into the destination directory
"""
