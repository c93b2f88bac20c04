# src/task_manager/__main__.py

from .cli.main import main

raise SystemExit(main())
