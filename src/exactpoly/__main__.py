from exactpoly.cli import main

raise SystemExit(main())
