from .assembler import main

raise SystemExit(main())
