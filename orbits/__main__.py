from .simulation import main

raise SystemExit(main())
