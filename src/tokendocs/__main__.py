from src.tokendocs.cli import main

raise SystemExit(main())
