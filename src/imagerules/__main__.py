from imagerules.cli import main

raise SystemExit(main())
